from hostplat.cli.app import main

main()

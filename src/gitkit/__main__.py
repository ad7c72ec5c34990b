from gitkit.cli.cli import main

main()

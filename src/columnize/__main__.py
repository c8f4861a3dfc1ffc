from columnize.cli.main import main

main()

from carebook.cli import main

main()

from salute.cli import main

main()

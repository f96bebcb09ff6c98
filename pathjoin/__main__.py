from pathjoin.cli import main

main()

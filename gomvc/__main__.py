from gomvc.cli import main

main()

from shell.shell import main

main()

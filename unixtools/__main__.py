from unixtools.launcher import main

main()

from appcheck.main import main

main()

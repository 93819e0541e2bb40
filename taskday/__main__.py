from taskday.main import main

main()

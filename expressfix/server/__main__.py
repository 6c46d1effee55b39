from expressfix.server.main import main

main()

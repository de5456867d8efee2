from typr.app import main

main()

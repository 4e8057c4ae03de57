from tilesnake.main import main

main()

from knights_tour import main

main()

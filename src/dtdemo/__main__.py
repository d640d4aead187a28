from dtdemo.program import main

main()

from schedgraph.cli import main

main()

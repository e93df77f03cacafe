from mapgraph.cli import main

main()

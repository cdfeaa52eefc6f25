from metadev.cli import main

main()

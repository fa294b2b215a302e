from ssr.cli import main

main()

from imageslots.cli import main

main()

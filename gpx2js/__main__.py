from gpx2js.cli import main

main()

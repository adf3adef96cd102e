from trail_profile.cli import main

main()

from relay_probe.cli import main

main()

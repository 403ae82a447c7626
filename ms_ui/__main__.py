from ms_ui.cli import main

main()

from zen_switcher.app import main

main()

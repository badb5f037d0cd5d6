from pystrkey.cli import main

raise SystemExit(main())

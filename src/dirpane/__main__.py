from dirpane.cli import main

raise SystemExit(main())

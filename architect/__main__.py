from architect.cli import main

raise SystemExit(main())

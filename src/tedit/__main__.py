from tedit.cli import main

raise SystemExit(main())

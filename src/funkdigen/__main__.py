from funkdigen.cli import main

raise SystemExit(main())

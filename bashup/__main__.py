from bashup.cli import main

raise SystemExit(main())

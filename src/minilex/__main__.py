from minilex.cli import main

raise SystemExit(main())

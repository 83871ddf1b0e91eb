from chartjs.cli import main

raise SystemExit(main())

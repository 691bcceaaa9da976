from guildsim.cli.run import main

raise SystemExit(main())

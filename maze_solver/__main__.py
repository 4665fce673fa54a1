from maze_solver.cli import main

raise SystemExit(main())

from avengement_solver.cli import main

raise SystemExit(main())

from paracurve.demo import main

raise SystemExit(main())

from api_mocking.cli import main

raise SystemExit(main())

from extauth.main import main

raise SystemExit(main())

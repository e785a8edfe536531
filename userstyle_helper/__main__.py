from userstyle_helper.cli_app import main

raise SystemExit(main())

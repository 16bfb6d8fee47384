from mcp_config_check.cli import main

raise SystemExit(main())

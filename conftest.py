pytest_plugins = ["vx_sysprops.testing.fixtures"]

from .main import _main

_main()

from .cli import filehasher_main

filehasher_main()

from .SPIDERFS import main

main()

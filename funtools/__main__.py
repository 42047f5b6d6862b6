"""
Same as the `funtools` console script:

    py -m funtools factorial 10
"""
from .cmdline import main

main()

""" python -m pyapplicative """
import sys

from .tour import main

sys.exit(main())

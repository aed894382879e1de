"""python -m weather_chat"""
import sys

from .entrypoint import main

sys.exit(main())

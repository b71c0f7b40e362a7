"""Allow running as: python -m requirement_elicitation"""

from requirement_elicitation.main import run, serve
import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        serve()
    else:
        run()

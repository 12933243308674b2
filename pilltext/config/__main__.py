"""
Command-line interface for pilltext configuration
"""

from . import print_config

if __name__ == "__main__":
    print_config()

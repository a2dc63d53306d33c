#!/usr/bin/env python3
"""
dicecup - dice, cups of dice and the throws they produce
"""

from dicecup.cli.__main__ import main


if __name__ == '__main__':
    main()

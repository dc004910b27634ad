#!/usr/bin/env python3
"""evy - A minimal modal text editor.

Usage:
    python main.py [filename]

Keys:
    Normal mode: h/j/k/l or arrows move, i insert, o open line below,
                 x delete character, : command line
    Insert mode: type to insert, Enter splits, Backspace deletes or joins,
                 Esc returns to Normal mode
    Commands:    :w [file]  :q  :wq [file]
"""

from evy.__main__ import main


if __name__ == "__main__":
    main()

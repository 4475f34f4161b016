import sys

from gpt_chat.cli import main

if __name__ == "__main__":
    sys.exit(main())

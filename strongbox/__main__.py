"""Entry point for python -m strongbox"""

from strongbox.demo import main

if __name__ == "__main__":
    main()

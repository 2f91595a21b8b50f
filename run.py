#!/usr/bin/env python

import sys

from clkreset import cli


def main():
    sys.exit(cli.main())


if __name__ == '__main__':
    main()

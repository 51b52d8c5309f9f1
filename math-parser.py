#!/usr/bin/env python3

import logging

from mathparser import main

if __name__ == '__main__':
    logging.basicConfig(level=logging.WARNING)
    main()

# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import logging
import logging.config
import os
import traceback
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(module)s:%(lineno)d] %(message)s"

logging_initialized = False

def init(config_file=None):
    global logging_initialized

    # An explicit config_file replaces whatever configuration is active.
    if logging_initialized and not config_file:
        return

    if not config_file:
        config_file = "logging.ini"
        if len(sys.argv) >= 3:
            if sys.argv[1] == "-l":
                config_file = sys.argv[2]

    if os.path.exists(config_file):
        logging.config.fileConfig(\
            config_file, disable_existing_loggers=False)
    else:
        # No logging.ini in the working directory, ie: used as a library.
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)

    logging_initialized = True

def handle_exception(log, info):
    log.fatal("{} threw [{}]: {}".format(\
        info, sys.exc_info()[0], str(sys.exc_info()[1])))
    traceback.print_tb(sys.exc_info()[2])

def printl(value):
    print(value, end='')

if not logging_initialized:
    init()

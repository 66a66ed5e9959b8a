#!/usr/bin/python3
# Copyright (c) 2014-2016  Sam Maloney.
# License: GPL v2.

import llog

import argparse
import logging
import sys

import mbase64

log = logging.getLogger(__name__)

def main(argv=None):
    parser = argparse.ArgumentParser(\
        description="Encode or decode standard base64.")
    parser.add_argument(\
        "-l", dest="logconf",\
        help="Specify alternate logging.ini [IF SPECIFIED, THIS MUST BE THE"\
            " FIRST PARAMETER!].")
    parser.add_argument(\
        "-d", dest="decode", action="store_true",\
        help="Decode base64 text instead of encoding.")
    parser.add_argument(\
        "-i", type=str,\
        help="Read input from specified file instead of stdin.")
    parser.add_argument(\
        "-o", type=str,\
        help="Send output to specified file.")

    args = parser.parse_args(argv)

    if args.logconf:
        llog.init(args.logconf)

    try:
        if args.i:
            with open(args.i, "rb") as f:
                data = f.read()
        else:
            data = sys.stdin.buffer.read()

        result = _process(args, data)

        if args.o:
            with open(args.o, "wb") as f:
                f.write(result)
        elif args.decode:
            sys.stdout.buffer.write(result)
            sys.stdout.flush()
        else:
            llog.printl(result.decode() + "\n")
    except mbase64.DecodeError as e:
        log.error("Input is not valid base64: {}".format(e))
        return 1
    except OSError:
        llog.handle_exception(log, "mb64 I/O")
        return 1

    return 0

def _process(args, data):
    if not args.decode:
        if log.isEnabledFor(logging.INFO):
            log.info("Encoding [{}] bytes.".format(len(data)))
        return mbase64.encode(data).encode()

    # One character per byte so positions in errors are byte offsets.
    text = data.strip(b" \t\r\n").decode("latin-1")

    if log.isEnabledFor(logging.INFO):
        log.info("Decoding [{}] characters.".format(len(text)))

    return mbase64.decode(text)

if __name__ == "__main__":
    sys.exit(main())

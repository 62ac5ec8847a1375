"""
Command-line entry point: the ggist option table.

    $ python -m ggopts --files a.py b.py --description "two files" -v
    $ python -m ggopts --help

Parses the vector against the table below and pretty-prints the resulting
namespace. Faults are printed to stderr and exit with status 1. Uploading,
downloading and the history journal are handled by the gist client, which
consumes the namespace; none of that happens here.
"""
import sys

from rich.pretty import pprint

from . import reports
from .faults import OptionException, trigger
from .helper import display
from .options import flag, integers, string, strings
from .scanner import parse

__prog__ = "ggist"

OPTIONS = (
    string("description,d", "Add a description when uploading a gist."),
    strings("files,f", "Set files to upload as gist."),
    flag("help", "Print this help message."),
    strings("get,g", "Download specified gists."),
    flag("line-numbers,l", "Print line numbers in source files."),
    flag("history,h", "Print your gist history"),
    integers("index,i", "Get Gists with Index i from history."),
    string("file-name,n", "Set a filename; Useful when uploading from stdin."),
    flag("verbose,v", "Print more information about gists if possible."),
    strings("user,u", "Retrieve gists from a user."),
)


def main(argv=None):
    try:
        namespace = parse(OPTIONS, sys.argv[1:] if argv is None else argv)
    except OptionException as fault:
        trigger(fault, shell=True, prog=__prog__)
        raise  # unreachable, trigger exits in shell mode

    if namespace.help:
        display(OPTIONS)
        return 0

    verbose, reports.verbose = reports.verbose, namespace.verbose
    try:
        for argument in namespace.arguments:
            reports.warning("ignoring positional argument %r" % argument)

        requested = ("files", "get", "index", "user", "history")
        if not any(namespace[dest] for dest in requested):
            reports.info("nothing to do; run '%s --help' to see all options" % __prog__)

        reports.debug("parsed %d option slots and %d positional arguments" % (len(namespace), len(namespace.arguments)))
        pprint(namespace)
    finally:
        reports.verbose = verbose
    return 0


if __name__ == "__main__":
    sys.exit(main())

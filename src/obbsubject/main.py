import sys
import logging
import argparse

from . import subject_from_file, errors
from .oids import REGISTRIES

LOG = logging.getLogger(__name__)


def subject_dump(args):
    try:
        subject = subject_from_file(
            args.input, names=REGISTRIES[args.registry], parsed=args.parsed
        )
    except OSError as exc:
        LOG.error("Error reading file %s: %s", args.input, exc)
        return 1
    except errors.CertificateError as exc:
        LOG.error("Error parsing certificate: %s", str(exc))
        return 1
    except errors.SubjectError as exc:
        LOG.error("Error parsing subject DN: %s", str(exc))
        return 1

    print(subject)
    return 0


def set_logging(level):
    logging.getLogger().setLevel(level)


def main(argv=sys.argv[1:]):
    """Entry point for the application script"""

    logging.basicConfig(level=logging.WARNING)

    parser = argparse.ArgumentParser(
        prog="obbsubject",
        description="Print the subject DN of a PEM or DER certificate",
    )
    parser.add_argument("--loglevel", default="WARNING")
    parser.add_argument(
        "--registry",
        choices=sorted(REGISTRIES),
        default="extended",
        help="attribute short name table",
    )
    parser.add_argument(
        "--parsed",
        action="store_true",
        help="render from the decoded name instead of the raw subject bytes",
    )
    parser.add_argument("input", help="path of the certificate")

    args = parser.parse_args(argv)

    set_logging(args.loglevel.upper())
    return subject_dump(args)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

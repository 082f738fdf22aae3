import json
import logging
import os
import sys
import argparse

from . import patcher
from .errors import RomError, SourceUnreadable
from .models.rom_settings import RomSettings
from .rom import Rom

parser = argparse.ArgumentParser(prog="alttp_rom", description="Patch an A Link to the Past ROM")
parser.add_argument('-r', '--rom', dest="rom", type=str, required=True)
parser.add_argument('-o', '--out', dest="out", type=str, required=True)
parser.add_argument('-p', '--patch', dest="patches", type=str, action='append', default=[])
parser.add_argument('-s', '--settings', dest="settings", type=str, required=False, default=None)
parser.add_argument('--vanilla', dest="vanilla", action='store_true')
parser.add_argument('--base-check', dest="base_check", action='store_true')
parser.add_argument('--ips', dest="ips", type=str, required=False, default=None)
parser.add_argument('--bsdiff', dest="bsdiff", type=str, required=False, default=None)
parser.add_argument('--log', dest="log", type=str, required=False, default=None)

parser.set_defaults(vanilla=False)
parser.set_defaults(base_check=False)


def main(argv):
    args = parser.parse_args(argv)

    log_file_path = args.log or os.path.join(os.path.dirname(os.path.abspath(args.out)), "alttp_rom.log")
    logging.basicConfig(filename=log_file_path, filemode='w', format='%(message)s', level=logging.DEBUG)
    logger = logging.getLogger("ALttP")

    try:
        patch(args, logger)
    except RomError as e:
        logger.error("ERROR: %s", e)
        print("Error: %s" % e, file=sys.stderr)
        return 1
    return 0


def load_settings(file_name: str) -> RomSettings:
    try:
        with open(file_name, "r") as f:
            return RomSettings.from_dict(json.load(f))
    except (OSError, ValueError) as e:
        raise SourceUnreadable("Settings file not readable: %s (%s)" % (file_name, e))


def patch(args, logger) -> None:
    settings = load_settings(args.settings) if args.settings else None

    with Rom(args.rom, logger) as rom:
        if args.base_check and not rom.check_md5():
            logger.warning("Source ROM md5 %s does not match the base build", rom.get_md5())
            print("Warning: source ROM is not the expected base ROM")
        original = rom.image.getvalue()

        if args.vanilla:
            rom.write_vanilla()
        for file_name in args.patches:
            rom.apply_patch_file(file_name)
        if settings is not None:
            rom.apply_settings(settings)
        rom.update_checksum()

        for warning in rom.warnings:
            print("Warning: %s" % warning)

        patched = rom.image.getvalue()
        rom.save(args.out)

    print("ROM created: " + args.out)
    if args.ips:
        write_file(args.ips, patcher.create_ips(original, patched))
        print("IPS patch created: " + args.ips)
    if args.bsdiff:
        write_file(args.bsdiff, patcher.create_bsdiff(original, patched))
        print("bsdiff patch created: " + args.bsdiff)


def write_file(file_name: str, data: bytes) -> None:
    with open(file_name, "wb") as f:
        f.write(data)


def main_entry():
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    main_entry()

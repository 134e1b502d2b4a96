# notas/manifest.py
import argparse
import json
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from notas.config import (ROOT, STATIC, NotasConfig, configure_logging,
                          load_config)
from notas.library import FileDescriptor, ListingError, list_files

OUTPUT_FILE = ROOT / "public" / "notas.json"


def build_manifest(config: NotasConfig, output: Path) -> List[FileDescriptor]:
    files = list_files(config)
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding="utf-8") as f:
        json.dump([d.to_dict() for d in files], f, indent=4, ensure_ascii=False)
    return files


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Write the notas.json manifest")
    parser.add_argument("--dir", help="folder holding the PDFs (default: public/notas)")
    parser.add_argument("--output", default=str(OUTPUT_FILE), help="manifest path")
    args = parser.parse_args(argv)
    configure_logging()

    overrides = {"locator": STATIC, "create_missing": True, "strict": True}
    try:
        config = load_config(**overrides)
        if args.dir:
            config = replace(config, directory=Path(args.dir))
        files = build_manifest(config, Path(args.output))
    except (ListingError, OSError, ValueError) as e:
        print("Error updating file list:", e)
        return 1
    print(f"Updated {args.output} with {len(files)} files.")
    print("Files found:", ", ".join(f.name for f in files))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

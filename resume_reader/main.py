import argparse
import json
from pathlib import Path

from .contact import extract_contact
from .extractor import extract_text


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Extract plain text and contact links from a PDF or DOCX resume"
    )
    parser.add_argument("resume_path", help="Path to resume (.pdf or .docx)")
    parser.add_argument("--out", default="resume_text.json", help="Output JSON file")
    args = parser.parse_args(argv)

    path = Path(args.resume_path)
    text = extract_text(path.read_bytes(), path.name)
    data = {"contact": extract_contact(text), "text": text}

    with open(args.out, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    print(f"Extracted resume saved to: {args.out}")
    print("Contact:", data["contact"])
    print("Characters:", len(text))
    return data


if __name__ == "__main__":
    main()

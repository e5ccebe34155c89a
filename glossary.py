import sys
import time

from debug_tools import DEBUG
from definitions import load_glossary
from errors import GlossaryError
from render_pages import render_glossary
from text_io import Directory

INPUT_PROMPT = "Enter the name of the input file: "
OUTPUT_PROMPT = "Enter the location of the folder to save the files in: "


def generate(input_path, output_path, progress=print):
    """
    Read the glossary file and write the index and term pages into the output folder.
    Nothing is written when the input can't be parsed.
    """
    DEBUG.add_flow("parse_started")
    store = load_glossary(input_path)
    DEBUG.add_flow("parse_completed")

    return render_glossary(store, Directory(output_path), progress=progress)


def main():
    try:
        input_path = input(INPUT_PROMPT).strip()
        output_path = input(OUTPUT_PROMPT).strip()
    except EOFError:
        print("\nError: no input file and output folder were given")
        return 1

    start_time = time.time()
    print("Generating files...")

    try:
        generate(input_path, output_path)
    except GlossaryError as e:
        print(f"Error: {e.message}")
        return 1
    finally:
        # Emit a single consolidated debug report (if enabled)
        report = DEBUG.emit()
        if report:
            print(report)

    print(f"Finished in {time.time() - start_time:.2f}s")
    print("Now quitting...")
    return 0


if __name__ == "__main__":
    sys.exit(main())

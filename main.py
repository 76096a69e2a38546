import argparse
import logging
import tkinter as tk

from word_highlighter.app import App


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Highlight configured words in text documents.")
    parser.add_argument("files", nargs="*", help="documents to open")
    parser.add_argument("--config", help="JSON file mapping words to background colors")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    root = tk.Tk()
    try:
        from ctypes import windll
        windll.shcore.SetProcessDpiAwareness(1)
    except (ImportError, AttributeError, OSError):
        pass

    App(root, config_path=args.config, files=args.files)
    root.mainloop()


if __name__ == "__main__":
    run()

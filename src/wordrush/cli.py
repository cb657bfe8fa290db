#!/usr/bin/env python3
"""Command-line interface for Word Rush."""

import argparse
import logging
import sys
from pathlib import Path

from .config import TrainerConfig
from .session import TrainerSession
from .wordlist import DEFAULT_WORDS, load_words


def resolve_words(path):
    """Load words from `path`, or fall back to the built-in list."""
    if path is None:
        return list(DEFAULT_WORDS)
    return load_words(path)


def build_config(args) -> TrainerConfig:
    """Environment settings overridden by any command-line flags."""
    config = TrainerConfig.load()
    if getattr(args, 'window_size', None) is not None:
        config.window_size = args.window_size
    if getattr(args, 'ttl', None) is not None:
        config.ttl_millis = args.ttl
    if getattr(args, 'seed', None) is not None:
        config.seed = args.seed
    if getattr(args, 'words', None) is not None:
        config.words_path = args.words
    return config


def print_window(session: TrainerSession):
    snap = session.snapshot()
    for i, word in enumerate(snap.words, 1):
        print(f"  {i:2d}. {word}")


def print_summary(session: TrainerSession):
    snap = session.snapshot()
    seconds = snap.elapsed_millis // 1000
    print(f"Time: {seconds // 60:02d}:{seconds % 60:02d}")
    print(f"Typed Count: {snap.typed_count}")
    print(f"WPM: {snap.wpm:.1f}")


def parse_script(lines):
    """Parse replay script lines into (action, time_ms, text) tuples.

    Format, one event per line:
        tick <ms>
        type <ms> <text...>
    Blank lines and lines starting with `#` are skipped; a `#` later in
    the line is part of the typed text.
    """
    events = []
    for lineno, raw in enumerate(lines, 1):
        line = raw.strip()
        if not line or line.startswith('#'):
            continue
        parts = line.split(None, 2)
        action = parts[0].lower()
        if action not in ('tick', 'type') or len(parts) < 2:
            raise ValueError(f"Line {lineno}: expected 'tick <ms>' or 'type <ms> <text>'")
        try:
            at = int(parts[1])
        except ValueError:
            raise ValueError(f"Line {lineno}: invalid time {parts[1]!r}") from None
        text = parts[2] if len(parts) > 2 else ''
        events.append((action, at, text))
    return events


def cmd_words(args):
    """Show word list statistics."""
    config = build_config(args)
    path = args.file or config.words_path
    words = resolve_words(path)
    source = path or 'built-in list'

    print(f"Source: {source}")
    print(f"Words: {len(words)}")
    if not words:
        print("Error: word list is empty", file=sys.stderr)
        return 1

    unique = {w.lower() for w in words}
    lengths = [len(w) for w in words]
    print(f"Unique: {len(unique)}")
    print(f"Length: {min(lengths)}-{max(lengths)}")

    if len(unique) < config.window_size:
        print(f"WARNING: fewer unique words than window size ({config.window_size}); "
              f"duplicates will appear on screen", file=sys.stderr)
    return 0


def cmd_replay(args):
    """Replay a scripted session with synthetic timestamps."""
    config = build_config(args)
    words = resolve_words(config.words_path)
    events = parse_script(args.script.read_text(encoding='utf-8').splitlines())

    clock_value = [args.start]
    session = TrainerSession(words, config=config, clock=lambda: clock_value[0])
    session.start()
    print(f"t={args.start}: start")
    print_window(session)

    for action, at, text in events:
        clock_value[0] = at
        before = session.state.window
        if action == 'tick':
            # A backwards tick in a script is an error, not a skipped frame
            session.state = session.engine.advance_time(session.state, at)
            print(f"t={at}: tick")
        else:
            matched = session.type_text(text)
            print(f"t={at}: type {text!r} -> {'hit' if matched else 'miss'}")
        if args.verbose or session.state.window is not before:
            print_window(session)

    print()
    print_summary(session)
    return 0


def cmd_play(args):
    """Interactive terminal session."""
    config = build_config(args)
    words = resolve_words(config.words_path)
    session = TrainerSession(words, config=config)
    session.start()

    print("Type a word from the list and press Enter. Ctrl-D to quit.")
    print_window(session)
    while True:
        try:
            line = input('> ')
        except (EOFError, KeyboardInterrupt):
            print()
            break
        # Submit before ticking: the user answered the window they were shown
        matched = session.type_text(line)
        session.tick()
        print("Hit!" if matched else "Miss")
        print_window(session)

    print_summary(session)
    return 0


def cmd_gui(args):
    """Launch the Kivy app."""
    try:
        from .gui.app import main as gui_main
    except ImportError as e:
        print(f"GUI unavailable ({e}). Install with: pip install .[gui]", file=sys.stderr)
        return 1
    gui_main(build_config(args))
    return 0


def add_session_options(parser):
    parser.add_argument('-w', '--words', type=Path,
                        help='Word list file (.xml or plain text; default: built-in)')
    parser.add_argument('-n', '--window-size', type=int,
                        help='Number of words on screen (default: 10)')
    parser.add_argument('-t', '--ttl', type=int,
                        help='Milliseconds before an untyped word is replaced (default: 5000)')
    parser.add_argument('-s', '--seed', type=int,
                        help='Random seed for reproducible word order')


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Rotating-window typing speed trainer',
        prog='wordrush'
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Verbose output and debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # words command
    words_parser = subparsers.add_parser('words', help='Show word list statistics')
    words_parser.add_argument('file', type=Path, nargs='?',
                              help='Word list file (default: built-in list)')
    words_parser.add_argument('-n', '--window-size', type=int,
                              help='Window size to check the list against')

    # replay command
    replay_parser = subparsers.add_parser('replay', help='Replay a scripted session')
    replay_parser.add_argument('script', type=Path, help='Script of tick/type events')
    replay_parser.add_argument('--start', type=int, default=0,
                               help='Session start time in ms (default: 0)')
    add_session_options(replay_parser)

    # play command
    play_parser = subparsers.add_parser('play', help='Interactive terminal session')
    add_session_options(play_parser)

    # gui command
    gui_parser = subparsers.add_parser('gui', help='Launch the graphical trainer')
    add_session_options(gui_parser)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    if args.command is None:
        parser.print_help()
        return 1

    commands = {
        'words': cmd_words,
        'replay': cmd_replay,
        'play': cmd_play,
        'gui': cmd_gui,
    }
    try:
        return commands[args.command](args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main() or 0)

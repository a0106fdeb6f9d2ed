"""Interactive prompts for download options."""

from __future__ import annotations

import sys


def _read_answer() -> str:
    """Read one line from standard input; an empty string at end of input."""
    return sys.stdin.readline().strip()


def choose_video_options() -> tuple[str, bool]:
    """Ask for the video format and whether to keep the original files."""
    print(
        "Entrez le format de sortie (ex. 'mp4', 'webm', "
        "laissez vide pour le format par défaut) :"
    )
    video_format = _read_answer()
    print("Voulez-vous conserver les fichiers originaux après la fusion ? (o/n) :")
    keep_files = _read_answer().lower() == "o"
    return video_format, keep_files


def choose_audio_format() -> str:
    """Ask for the audio output format."""
    print("Entrez le format de sortie audio (ex. 'mp3', 'aac', 'flac', 'wav') :")
    return _read_answer()


def ask_to_continue() -> bool:
    """Ask whether the user wants to download more files."""
    print("Souhaitez-vous continuer à télécharger d'autres fichiers ? (o/n) :")
    return _read_answer().lower() == "o"
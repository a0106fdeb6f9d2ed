"""Video and audio downloads driven by yt-dlp."""

from __future__ import annotations

import subprocess
import sys
import threading
from pathlib import Path
from typing import Callable, Iterable

import platformdirs
from tqdm import tqdm

from mediafetch.progress import parse_progress, show_progress_line

_DESTINATION_MARKER = "[download] Destination: "
_BAR_FORMAT = "{desc} [{bar}] {n_fmt}/{total_fmt} ({remaining})"

ProgressParser = Callable[[str], "tuple[int, int] | None"]


class DownloadError(RuntimeError):
    """Raised when yt-dlp cannot be started or reports a failure."""


def default_download_dir() -> Path | None:
    """Return the user's download directory, or None if there is none."""
    directory = platformdirs.user_downloads_dir()
    return Path(directory) if directory else None


def build_video_command(
    url: str, format: str, keep_files: bool, download_path: Path | str | None
) -> list[str]:
    """Build the yt-dlp argument list for a video download."""
    args = ["yt-dlp"]
    if download_path is not None:
        args += ["-P", str(download_path)]
    args.append(url)
    if keep_files:
        args.append("-k")
    if format:
        args += ["-f", format]
    return args


def build_audio_command(
    url: str, audio_format: str, download_path: Path | str | None
) -> list[str]:
    """Build the yt-dlp argument list for an audio extraction."""
    args = ["yt-dlp"]
    if download_path is not None:
        args += ["-P", str(download_path)]
    args += ["-f", "bestaudio", "--extract-audio", "--audio-format", audio_format, url]
    return args


def _echo_lines(stream: Iterable[str]) -> None:
    for raw in stream:
        print(raw.rstrip("\r\n"))


def _run_download(
    args: list[str],
    parse_line: ProgressParser,
    success_message: str,
    failure_message: str,
) -> Path | None:
    """Run yt-dlp, relay its output, track progress and return the saved file."""
    try:
        process = subprocess.Popen(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            bufsize=1,
        )
    except OSError as exc:
        raise DownloadError("Erreur lors de l'exécution de yt-dlp") from exc

    echo = threading.Thread(target=_echo_lines, args=(process.stderr,), daemon=True)
    echo.start()

    destination: str | None = None
    with tqdm(total=100, bar_format=_BAR_FORMAT, ascii="-#", file=sys.stderr) as bar:
        for raw in process.stdout:
            line = raw.rstrip("\r\n")
            print(line)
            _, marker, rest = line.partition(_DESTINATION_MARKER)
            if marker:
                destination = rest
            parsed = parse_line(line)
            if parsed is not None:
                downloaded, total = parsed
                bar.total = total
                bar.n = downloaded
                bar.refresh()
        returncode = process.wait()
    echo.join()

    if returncode != 0:
        print(failure_message, file=sys.stderr)
        raise DownloadError(failure_message)

    print(success_message)
    if destination is None:
        return None
    base = default_download_dir() or Path.cwd()
    full_path = base / destination
    print(f'Chemin du fichier téléchargé : "{full_path}"')
    return full_path


def download_video(url: str, format: str, keep_files: bool) -> Path | None:
    """Download a video; return the path of the saved file if yt-dlp named it."""
    args = build_video_command(url, format, keep_files, default_download_dir())
    return _run_download(
        args,
        show_progress_line,
        "La vidéo a été téléchargée avec succès !",
        "Erreur lors du téléchargement de la vidéo.",
    )


def download_audio(url: str, audio_format: str) -> Path | None:
    """Download and extract audio; return the saved file's path if known."""
    args = build_audio_command(url, audio_format, default_download_dir())
    return _run_download(
        args,
        parse_progress,
        "L'audio a été téléchargée avec succès !",
        "Erreur lors du téléchargement de l'audio.",
    )
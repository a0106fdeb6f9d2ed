# mediafetch

`mediafetch` is an interactive terminal tool for downloading video or audio
from online media sites. It does not download anything itself. It drives
`yt-dlp`, and `ffmpeg` is needed for merging streams and extracting audio.

## Installation

```
pip install mediafetch
```

At startup, `mediafetch` checks that `ffmpeg` and `yt-dlp` are on the
`PATH`. If one of them is missing, it tries to install it:

- Linux: `ffmpeg` through `apt`, using `sudo` when it is available. For
  `yt-dlp`, the latest release is fetched with `curl` into
  `/usr/local/bin/yt-dlp`.
- macOS: Homebrew. If Homebrew itself is missing, it is installed first.
- Windows: Chocolatey. If that fails, Scoop is used. Each package manager
  is installed first if it is missing.

If the installation fails, the program prints the error and exits with
status 1. It also reports whether the `curl` command is available.

## Usage

```
mediafetch
```

The program shows a menu:

```
   [1] 🎥 Vidéo
   [2] 🎧 Audio
   [q] ❌ Quitter
```

- **Video (`1`):** enter the URL, then an output format such as `mp4` or
  `webm`. Leave the format empty to get `yt-dlp`'s default. You are then
  asked whether to keep the original files after merging; answer `o` to
  keep them, which passes `-k`.
- **Audio (`2`):** enter the URL and an audio format such as `mp3`, `aac`,
  `flac` or `wav`. The program runs `yt-dlp -f bestaudio --extract-audio
  --audio-format <format>`.
- **Quit (`q` or `Q`):** leaves the program. The end of input also quits.

Files go to your Downloads folder. `yt-dlp`'s output is printed as it
arrives, and a progress bar follows the download. When the download
finishes, the full path of the file is printed if `yt-dlp` named a
destination. After each download you are asked whether to continue
(`o` for yes). If `yt-dlp` fails, the program exits with status 1.

The prompts and messages are in French.

## Using it from Python

```python
from mediafetch.progress import parse_progress, format_progress
from mediafetch.downloader import build_video_command, build_audio_command

parse_progress("[download]  50.0% of 100.00MiB at 1.23MiB/s ETA 00:01")
# (52428800, 104857600)

format_progress(52428800, 104857600)
# '[#####.....] 50% (50.0MB / 100.0MB)'

build_video_command("https://example.com/video", "mp4", True, None)
# ['yt-dlp', 'https://example.com/video', '-k', '-f', 'mp4']

build_audio_command("https://example.com/video", "mp3", "/tmp/dl")
# ['yt-dlp', '-P', '/tmp/dl', '-f', 'bestaudio', '--extract-audio',
#  '--audio-format', 'mp3', 'https://example.com/video']
```

Notes on these functions:

- `parse_progress` understands `KiB`, `MiB` and `GiB` sizes. It returns
  `None` for any line that is not a progress line.
- `format_progress` raises `ValueError` when a byte count is negative, or
  when the current count exceeds the total.
- `mediafetch.downloader.download_video(url, format, keep_files)` and
  `download_audio(url, audio_format)` run `yt-dlp`. Each returns the path
  of the saved file, or `None` if `yt-dlp` did not report it. Both raise
  `DownloadError` on failure.
- `default_download_dir()` returns the user's Downloads folder.
- `mediafetch.installers.ensure_dependencies()` raises `InstallError` when
  a tool cannot be installed. `is_command_available(cmd)` looks a command
  up on the `PATH`.
- `mediafetch.commands.check_command(cmd)` checks a command through
  `sh -c "command -v ..."`.

## Limitations

- The program works only interactively. It takes no command-line options
  for the URL or the format, and it has no batch mode.
- It has no playlist handling or quality selection beyond what you pass as
  the `yt-dlp` format.
- Automatic installation of missing tools covers only `apt` on Linux,
  Homebrew on macOS, and Chocolatey or Scoop on Windows.

## Tests

```
pip install "mediafetch[test]"
pytest
```
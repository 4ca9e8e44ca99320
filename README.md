# nrclaunch

nrclaunch holds the building blocks for preparing a game client launch:

- reading version manifests and version profiles, and merging a child profile into the profile it inherits from (`nrclaunch.version`)
- evaluating library and argument rules against the operating system, OS version, architecture and feature set (`nrclaunch.rules.check_condition`)
- building JVM and game argument lists from a profile and a `LaunchingParameter` (`nrclaunch.arguments.add_jvm_args`, `add_game_args`)
- filling in `${...}` placeholders in those arguments (`nrclaunch.templates.process_templates`, `substitute`)
- downloading libraries, game asset objects and launcher assets, checked against SHA-1 or MD5 (`nrclaunch.assets`)
- extracting ZIP and `.tar.gz` archives with sanitised paths (`nrclaunch.extract`)
- clearing the mods folder of a branch and resolving a loader profile together with its parent (`nrclaunch.prelauncher`)
- copying saves, resource packs, shader packs, `options.txt` and `servers.dat` between game folders (`nrclaunch.copy_data`)
- progress updates that serialise to `{"type": ..., "value": ...}` (`nrclaunch.progress`)

## Installation

```
pip install .
```

Install with `pip install .[test]` to get the test tools as well.

## Command line

```
nrclaunch [--data-dir DIR] [--config-dir DIR]
```

The command logs to `logs/latest.log` in the data directory and to stderr. When `latest.log` grows past about 2 MB it is rolled into `logs/archive/launcher.N.log`, keeping ten archives. It then creates the data directory, the config directory and `nrc_cache` inside the data directory. Without options, the per-user directories from `nrclaunch.app.launcher_dirs()` are used.

## Library use

```python
from nrclaunch.maven import get_maven_artifact_path
from nrclaunch.progress import ProgressUpdate, ProgressStep
from nrclaunch.templates import substitute

get_maven_artifact_path("net.fabricmc:fabric-loader:0.14.21")
# 'net/fabricmc/fabric-loader/0.14.21/fabric-loader-0.14.21.jar'

ProgressUpdate.set_for_step(ProgressStep.DOWNLOAD_LIBRARIES, 5, 10).to_dict()
# {'type': 'progress', 'value': 3584}

substitute("--gameDir ${game_directory}", {"game_directory": "/games/main"})
# '--gameDir /games/main'
```

Other entry points:

- `VersionManifest.download(app_data)` and `VersionProfile.download(path, url)` fetch the manifest or a profile and cache it. If the request or parsing fails, they read the cached copy instead.
- `resolve_version_profile(cache_dir, manifest_url, version_manifest)` downloads a loader profile. If the profile inherits from a game version, it also downloads that version and merges it in. `fabric_manifest_url` fills the version numbers into a loader manifest URL template.
- `download_library(info, name, libraries_folder, progress)` reuses an existing file when its SHA-1 matches and downloads it otherwise. When no hash is declared, it reads or fetches the `.sha1` file.
- `copy_mc_data` and `copy_branch_data` report each copied file to an optional callback as a `CopyEvent`.

Progress goes to any object with a `progress_update(update)` method. `ProgressReceiver` keeps the latest maximum, progress and label and forwards each update to an optional callback.

## What it does not do

The package has no Java runtime handling: it does not look for a Java binary and does not download one. It also does not download the client jar or run the full download-and-launch sequence. It does not start the game process or forward the process's output. There is no graphical interface, and no account sign-in or launcher API client. The command only sets up logging and the launcher directories.
# mws

`mws` is a command-line tool for creating and managing configuration
profiles. Each profile is stored as a YAML file named after the profile
(`<name>.yaml`) in a `profiles` directory under the current working
directory. The directory is created when the command starts, if it does
not exist yet.

A profile file holds two fields:

```yaml
user: example
project: new-project
```

## Installation

```
pip install .
```

## Usage

Running `mws profile` without a subcommand prints a hint that one of
`create`, `get`, `list` or `delete` must be given.

Create a profile. All three options are required; an existing profile
with the same name is overwritten:

```
mws profile create --name=test --user=example --project=new-project
```

This writes `profiles/test.yaml` with the `user` and `project` fields.

Show one profile:

```
mws profile get --name=test
```

Output:

```
name: test
	user: example
	project: new-project
```

List every profile in the directory, ordered by file name. Only `.yaml`
files are read; directories and files that cannot be read as profiles
are skipped:

```
mws profile list
```

Delete a profile:

```
mws profile delete --name=test
```

Profile names must not be empty and must not contain `..` or `/`.
An invalid name, a missing profile or a file-system failure makes the
command print the error and exit with status 1. A missing required
option is reported as a usage error.

Use `--help` on any command to see its options:

```
mws --help
mws profile --help
```

## Using it from Python

```python
from mws.profile import Profile
from mws.repository import ProfileYAMLRepo, ProfileNotFoundError

repo = ProfileYAMLRepo("./profiles")
repo.create(Profile(name="test", user="example", project="new-project"))

print(repo.get("test"))
for profile in repo.list():
    print(profile.name)

repo.delete("test")
```

`mws.repository.is_name_valid(name)` tells whether a name is accepted.
`InvalidNameError`, `DirNotSpecifiedError` and `ProfileNotFoundError`
all derive from `RepositoryError`.

The command line can also be run from Python with any object that has
`create`, `list`, `get` and `delete` methods (see `mws.cli.ProfileRepo`):

```python
from mws.cli import main

status = main(["profile", "list"], repo=repo)
```

`mws.cli.format_profile(profile)` returns the text the commands print
for one profile.

## Running the tests

```
pip install ".[test]"
pytest
```
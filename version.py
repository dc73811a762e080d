import os
import re
import subprocess


# This line is updated automatically
version = "0.1.0"


def describe(cwd):
    """Return the version given by the closest git tag, or None."""
    try:
        description = subprocess.check_output(
            "git describe --tags".split(),
            stderr=subprocess.STDOUT,
            cwd=cwd,
            universal_newlines=True)
    except (OSError, subprocess.CalledProcessError):
        return None

    tag, *rest = description.rstrip().split("-")
    tag = tag.lstrip("v")

    if len(rest) == 0:  # tagged release
        return tag
    elif len(rest) == 2:  # tag + a few commits
        revision, commit = rest
        return "{}-r{}-{}".format(tag, revision, commit)
    else:
        raise RuntimeError("Invalid version format: " + description)


# Inside the repository, refresh the version number stored above, in a
# source distribution the stored number is up-to-date.
thisdir = os.path.dirname(os.path.abspath(__file__))
_described = describe(thisdir)

if _described is not None and _described != version:
    version = _described

    with open(__file__) as f:
        thisfile = f.read()

    with open(__file__, "w") as f:
        f.write(re.sub(r"version = \".*\"\n",
                       "version = \"{}\"\n".format(version),
                       thisfile, count=1))

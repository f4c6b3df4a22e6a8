"""Repository URL inference.

Turns the ``repo``/``vcs``/``display`` fields of a path entry into the
canonical repository URL, VCS kind, and ``go-source`` display template.

GitHub and Bitbucket URLs are recognized and filled in; anything else is
passed through untouched and must name its VCS explicitly::

    >>> infer_repo("https://github.com/user/proj").repo
    'https://github.com/user/proj.git'
"""

from dataclasses import dataclass

from vanityurls.errors import ConfigError

GITHUB_PREFIX = "https://github.com/"
BITBUCKET_PREFIX = "https://bitbucket.org/"
GIT_SUFFIX = ".git"

KNOWN_VCS = frozenset({"bzr", "git", "hg", "svn"})


@dataclass(frozen=True, slots=True)
class RepoTarget:
    """Canonical location of a repository, as advertised to the go tool."""

    repo: str
    vcs: str
    display: str = ""


def _split_user_repo(url: str, prefix: str) -> tuple[str, str] | None:
    """Split ``{prefix}user/repo`` into its two parts.

    Returns ``None`` unless the remainder is exactly two ``/``-separated
    components.
    """
    if not url.startswith(prefix):
        return None
    user, sep, repo = url[len(prefix) :].partition("/")
    if not sep or "/" in repo:
        return None
    return user, repo


def github_repo(url: str) -> tuple[str, str] | None:
    """Return ``(user, repo)`` for a GitHub HTTPS URL, ``.git`` removed."""
    parts = _split_user_repo(url, GITHUB_PREFIX)
    if parts is None:
        return None
    user, repo = parts
    return user, repo.removesuffix(GIT_SUFFIX)


def bitbucket_repo(url: str) -> tuple[str, str, bool] | None:
    """Return ``(user, repo, is_git)`` for a Bitbucket HTTPS URL.

    ``is_git`` records whether the URL carried a ``.git`` suffix; the
    suffix itself is removed from ``repo``.
    """
    parts = _split_user_repo(url, BITBUCKET_PREFIX)
    if parts is None:
        return None
    user, repo = parts
    if repo.endswith(GIT_SUFFIX):
        return user, repo[: -len(GIT_SUFFIX)], True
    return user, repo, False


def _source_display(base: str, tree: str, blob: str, anchor: str) -> str:
    return f"{base} {base}/{tree}{{/dir}} {base}/{blob}{{/dir}}/{{file}}{anchor}"


def infer_repo(repo_url: str, vcs: str = "", display: str = "", *, path: str = "") -> RepoTarget:
    """Resolve a configured repository into its canonical form.

    Args:
        repo_url: The ``repo`` value from the configuration.
        vcs: Explicit VCS hint; empty when the entry leaves it out.
        display: Explicit ``go-source`` display template; empty to use
            the host's default.
        path: The configured import path, used in error messages.

    Raises:
        ConfigError: If the hint contradicts the detected host, or the
            VCS cannot be determined.
    """
    github = github_repo(repo_url)
    if github is not None:
        user, repo = github
        base = f"{GITHUB_PREFIX}{user}/{repo}"
        if vcs and vcs != "git":
            msg = f"configuration for {path}: detected GitHub repository, but VCS = {vcs}"
            raise ConfigError(msg)
        return RepoTarget(
            repo=base + GIT_SUFFIX,
            vcs="git",
            display=display or _source_display(base, "tree/master", "blob/master", "#L{line}"),
        )

    bitbucket = bitbucket_repo(repo_url)
    if bitbucket is not None:
        user, repo, is_git = bitbucket
        base = f"{BITBUCKET_PREFIX}{user}/{repo}"
        if vcs == "hg":
            if is_git:
                msg = f"configuration for {path}: VCS is hg, but repo has .git suffix"
                raise ConfigError(msg)
            return RepoTarget(
                repo=base,
                vcs="hg",
                display=display
                or _source_display(base, "src/default", "src/default", "#{file}-{line}"),
            )
        if vcs == "git" or (not vcs and is_git):
            return RepoTarget(
                repo=base + GIT_SUFFIX,
                vcs="git",
                display=display
                or _source_display(base, "src/master", "src/master", "#{file}-{line}"),
            )
        if not vcs:
            msg = (
                f"configuration for {path}: must specify either 'vcs: git' or 'vcs: hg' "
                "for Bitbucket repository"
            )
            raise ConfigError(msg)
        msg = f"configuration for {path}: detected Bitbucket repository, but VCS = {vcs}"
        raise ConfigError(msg)

    if not vcs:
        msg = f"configuration for {path}: cannot infer VCS from {repo_url}"
        raise ConfigError(msg)
    if vcs not in KNOWN_VCS:
        msg = f"configuration for {path}: unknown VCS {vcs}"
        raise ConfigError(msg)
    return RepoTarget(repo=repo_url, vcs=vcs, display=display)

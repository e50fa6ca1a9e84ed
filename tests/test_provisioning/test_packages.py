"""
Tests for package installation ordering
"""

import pytest

from workstation.core.exceptions import CommandError, ConfigurationError
from workstation.provisioning.packages import PackageInstaller


@pytest.fixture
def installer(settings, runtime):
    return PackageInstaller(settings, runtime)


def asset(settings, relative):
    return str(settings.assets_dir / relative)


class TestPackageInstaller:
    """Fixed ordered command sequence"""

    def test_full_command_sequence(self, installer, runtime, settings):
        installer.install()

        assert runtime.calls == [
            ("copy", asset(settings, "conf/apt/backports.list"), "/etc/apt/sources.list.d"),
            ("exec_root", "apt", "update"),
            ("exec_root", "apt", "upgrade", "-y"),
            ("exec_root", "apt", "install", "-y", "btop", "curl", "git", "gpg"),
            ("exec_root", "apt", "install", "-y", "zsh"),
            ("copy", asset(settings, "installers/oh-my-zsh.sh"), "/tmp/oh-my-zsh.sh"),
            ("exec_user", "bash", "/tmp/oh-my-zsh.sh"),
            ("exec_root", "chsh", "headless", "-s", "/usr/bin/zsh"),
            ("copy", asset(settings, "installers/vscodium.sh"), "/tmp/vscodium.sh"),
            ("exec_root", "bash", "/tmp/vscodium.sh"),
            ("exec_root", "apt", "update"),
            ("exec_root", "apt", "install", "-y", "codium"),
            ("copy", asset(settings, "desktop/VSCodium.desktop"), "/home/headless/Desktop"),
            ("exec_root", "apt", "install", "-y", "build-essential", "php-cli", "php-xdebug", "python3", "valac"),
            ("exec_root", "apt", "install", "-t", "bookworm-backports", "-y", "golang-go"),
            ("exec_root", "curl", "-fsSL", "https://deb.nodesource.com/setup_22.x", "-o", "/tmp/nodesource_setup.sh"),
            ("exec_root", "bash", "/tmp/nodesource_setup.sh"),
            ("exec_root", "apt", "install", "-y", "nodejs"),
            ("exec_root", "npm", "install", "--global", "yarn"),
            ("exec_root", "apt", "install", "-y", "meson"),
            ("exec_root", "apt", "install", "-y", "mariadb-server"),
        ]

    def test_backports_added_and_refreshed_before_backports_install(self, installer, runtime):
        installer.install()

        calls = runtime.calls
        backports_copy = next(i for i, c in enumerate(calls) if c[-1] == "/etc/apt/sources.list.d")
        first_update = calls.index(("exec_root", "apt", "update"))
        golang = next(i for i, c in enumerate(calls) if "golang-go" in c)

        assert backports_copy < first_update < golang

    def test_oh_my_zsh_is_the_only_user_command(self, installer, runtime):
        installer.install()

        user_calls = [c for c in runtime.calls if c[0] == "exec_user"]
        assert user_calls == [("exec_user", "bash", "/tmp/oh-my-zsh.sh")]

    def test_first_failure_aborts_installation(self, installer, runtime):
        runtime.fail_on = lambda call: call == ("exec_root", "apt", "install", "-y", "codium")

        with pytest.raises(CommandError) as exc_info:
            installer.install()

        assert exc_info.value.returncode == 100
        assert runtime.calls[-1] == ("exec_root", "apt", "install", "-y", "codium")
        assert not any("nodejs" in c for c in runtime.calls)
        assert not any("mariadb-server" in c for c in runtime.calls)

    def test_custom_backports_suite(self, settings, runtime):
        settings.backports_suite = "trixie-backports"

        PackageInstaller(settings, runtime).install_languages()

        assert ("exec_root", "apt", "install", "-t", "trixie-backports", "-y", "golang-go") in runtime.calls

    def test_suite_missing_from_backports_list_fails_before_install(self, settings, runtime):
        settings.backports_suite = "trixie-backports"

        with pytest.raises(ConfigurationError) as exc_info:
            PackageInstaller(settings, runtime).install()

        assert "trixie-backports" in str(exc_info.value)
        assert runtime.calls == []

    def test_suite_listed_in_custom_assets_is_accepted(self, settings, runtime, tmp_path):
        list_file = tmp_path / "assets" / "conf" / "apt" / "backports.list"
        list_file.parent.mkdir(parents=True)
        list_file.write_text("deb http://deb.debian.org/debian trixie-backports main\n", encoding="utf-8")
        settings.assets_dir = tmp_path / "assets"
        settings.backports_suite = "trixie-backports"

        PackageInstaller(settings, runtime).add_backports()

        assert runtime.calls == [("copy", str(list_file), "/etc/apt/sources.list.d")]

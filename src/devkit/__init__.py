"""devkit-installer: wire the RubyInstaller DevKit into installed Rubies.

Import from submodules:
- core.injector: install_plan, install_root
- core.plan_store: load_plan, save_plan
- core.locator: locate_installed_runtimes
"""

__version__ = "0.1.0"

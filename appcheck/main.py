from appcheck.discovery import build_apps, detect_installed_apps
from appcheck.report import print_report
from appcheck.utils import configure_logging, detect_operating_system


def main():
    configure_logging()

    operating_system = detect_operating_system()
    apps = build_apps(operating_system)
    detect_installed_apps(apps)
    print_report(apps)


if __name__ == "__main__":
    main()

"""主程序入口"""
import sys

from formula.command_line import cli

if __name__ == "__main__":
    sys.exit(cli())

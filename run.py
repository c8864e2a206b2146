from scrobble_me_this.cli import run

if __name__ == "__main__":
    run()

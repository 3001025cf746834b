BANNER = "\n" + "=" * 60 + "\n"

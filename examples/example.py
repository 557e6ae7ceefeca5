"""Example script showing basic usage of the library."""

from yamlwrapper import YamlConfiguration


def main() -> YamlConfiguration:
    """Set a few values, read them back and print the YAML document."""
    config = YamlConfiguration()

    print("Setting some values...")
    config.set("key", "value")
    config.set("test.subkey", 1)
    config.set("test.subkey2", 2)
    config.set("a.b.c.d.e.f.g", True)
    config.set("list", ["item1", "item2", "item3", "item4", "item5"])

    print("Reading some values...\n")
    print(f"key: {config.get_string('key')}")
    print(f"test.subkey: {config.get_int('test.subkey')}")
    print(f"test.subkey2: {config.get_int('test.subkey2')}")
    print(f"a.b.c.d.e.f.g: {config.get_boolean('a.b.c.d.e.f.g')}")
    print(f"list: {config.get_list('list')}")
    print(f"unknown.key: {config.get_string('unknown.key', 'Default value')}")

    print("\nWhole configuration as string:")
    print(config.save_to_string())
    return config


if __name__ == "__main__":
    main()

import gconf
import uvicorn

from .app_factory import load_config


def main():
    gconf.set_env_prefix("DISKSTAT")
    load_config()
    uvicorn.run(
        "diskstat_api:create_app",
        factory=True,
        host=gconf.get("server.host"),
        port=int(gconf.get("server.port")),
        timeout_keep_alive=int(gconf.get("server.timeout_keep_alive")),
        log_config=None,
    )


if __name__ == "__main__":
    main()

import uvicorn

from app import config


CONFIG = config.Config()


if __name__ == "__main__":
    uvicorn.run(
        "app.app:app",
        host=CONFIG.host,
        port=CONFIG.port,
        reload=CONFIG.env == config.Env.local,
    )

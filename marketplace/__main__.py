import uvicorn

from marketplace.config import settings

if __name__ == "__main__":
    uvicorn.run("marketplace.main:app", host=settings.host, port=settings.port)

from fastapi import FastAPI
import logging

from tcconvert.config import settings
from tcconvert.api.testcase_import import router as testcase_import_router

app = FastAPI(
    title="Test Case CSV Converter",
    description="Convert Markdown / BDD test case text into CSV",
    version="1.0.0"
)

# 配置日誌
logging.basicConfig(level=logging.DEBUG if settings.app.debug else logging.INFO)

# 包含 API 路由
app.include_router(testcase_import_router)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.app.host, port=settings.app.port)

# =============================================================================
# pr_reviewer/__main__.py
# =============================================================================
import uvicorn
from pr_reviewer.core.config import settings

def main():
    uvicorn.run("pr_reviewer.main:app", host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    main()

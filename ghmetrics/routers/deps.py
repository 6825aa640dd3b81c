from fastapi import HTTPException, Query

def username_param(username: str = Query(..., description="GitHub username, e.g. 'torvalds'")) -> str:
    username = username.strip()
    if not username:
        raise HTTPException(422, "username must not be blank")
    return username

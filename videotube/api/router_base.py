from fastapi import APIRouter

router_video = APIRouter(
    prefix="/videos",
    tags=["Video"])

router_comment = APIRouter(
    prefix="/videos",
    tags=["Comment"])

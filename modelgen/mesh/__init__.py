"""Image-to-3D package.

Module split:
    - `client`: multipart upload to the 3D-generation endpoint.
    - `service`: stage wrapper that persists the returned `.glb` asset.
"""

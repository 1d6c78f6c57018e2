"""Dataset API responses."""

list_datasets_resp = [
    {
        "avail": 1073741824,
        "mountpoint": "/mnt/tank",
        "name": "tank",
        "pool": "tank",
        "refer": 90112,
        "used": 2097152,
        "comments": "",
    },
    {
        "avail": 1073741824,
        "mountpoint": "/mnt/tank/k8s",
        "name": "k8s",
        "pool": "tank",
        "refer": 90112,
        "used": 1048576,
        "comments": "kubernetes",
    },
    {
        "avail": 536870912,
        "mountpoint": "/mnt/tank/k8s/volumes",
        "name": "k8s/volumes",
        "pool": "tank",
        "refer": 45056,
        "used": 524288,
        "comments": "persistent volumes",
    },
    {
        "avail": 536870912,
        "mountpoint": "/mnt/tank/k8s/volumes",
        "name": "k8s/volumes",
        "pool": "tank",
        "refer": 1,
        "used": 1,
        "comments": "duplicate entry",
    },
]

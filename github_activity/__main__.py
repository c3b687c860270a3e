from github_activity.main import main

main()

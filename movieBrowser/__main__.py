from movieBrowser.main import main

main()
